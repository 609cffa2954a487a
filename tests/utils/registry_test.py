# -*- coding: utf-8 -*-
"""Test cases for the registry."""
import unittest

from sudoku_engine.hints import HINT_STRATEGIES, HintStrategy
from sudoku_engine.utils.registry import Registry


class DummyStrategy(HintStrategy):
    def find(self, grid, solution, size):
        return None


class TestRegistry(unittest.TestCase):
    """Test registry functionality."""

    def test_hint_strategy_registry_mapping(self):
        strategy_names = list(HINT_STRATEGIES._default_mapping.keys())
        for strategy_name in strategy_names:
            with self.subTest(strategy_name=strategy_name):
                strategy_cls = HINT_STRATEGIES.get(strategy_name)
                self.assertIsNotNone(
                    strategy_cls, f"{strategy_name} should be retrievable from registry"
                )
                self.assertTrue(
                    issubclass(strategy_cls, HintStrategy),
                    f"{strategy_name} should be a subclass of HintStrategy",
                )
        with self.assertRaises(ValueError):
            HINT_STRATEGIES.get("non_existent_strategy")

    def test_register_module(self):
        registry = Registry("dummy")

        @registry.register_module("first")
        class First:
            pass

        self.assertIs(registry.get("first"), First)
        self.assertEqual(First._name, "first")
        self.assertEqual(registry.names(), ["first"])

        with self.assertRaises(KeyError):
            registry.register_module("first", First)

        class Second:
            pass

        registry.register_module("first", Second, force=True)
        self.assertIs(registry.get("first"), Second)

        with self.assertRaises(TypeError):
            registry.register_module(1, Second)

    def test_dynamic_import(self):
        registry = Registry("dummy", default_mapping={"dummy": "tests.utils.registry_test.DummyStrategy"})

        strategy_cls = registry.get("dummy")
        self.assertEqual(strategy_cls.__name__, "DummyStrategy")
        self.assertIn("dummy", registry.modules)

        path = "tests.utils.registry_test.DummyStrategy"
        self.assertEqual(registry.get(path).__name__, "DummyStrategy")

        with self.assertRaises(ImportError):
            registry.get("tests.utils.registry_test.MissingStrategy")
        with self.assertRaises(ValueError):
            registry.get("missing")
