# CLI package for the Superposition algebra
"""
Command-line interface for evaluating superpositions.

Commands:
    superposition demo    — Run the worked examples
    superposition combine — Pairwise arithmetic
    superposition compare — Filter by a comparison
    superposition prime   — Primality test
    superposition sample  — Draw one eigenstate
"""
