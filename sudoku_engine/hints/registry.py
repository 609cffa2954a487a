from sudoku_engine.utils.registry import Registry

HINT_STRATEGIES: Registry = Registry(
    "hint_strategies",
    default_mapping={
        "naked_single": "sudoku_engine.hints.naked_single.NakedSingle",
        "naked_pair": "sudoku_engine.hints.naked_pair.NakedPair",
        "solution_fallback": "sudoku_engine.hints.solution_fallback.SolutionFallback",
    },
)
