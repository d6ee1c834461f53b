from properties.generators import (
    GeneratorConfig,
    GeneratorMode,
    Item,
    SequenceGenerator,
    SimilarSequenceGenerator,
    EdgeCaseGenerator,
    TestCaseGenerator,
    ChangesTestCase,
    generate_random_pairs,
    generate_similar_pairs,
    generate_test_cases
)


__all__ = [
    "GeneratorConfig",
    "GeneratorMode",
    "Item",
    "SequenceGenerator",
    "SimilarSequenceGenerator",
    "EdgeCaseGenerator",
    "TestCaseGenerator",
    "ChangesTestCase",
    "generate_random_pairs",
    "generate_similar_pairs",
    "generate_test_cases"
]
