from .tournaments import (
    generate_sample_names,
    simulate_elimination,
    simulate_round,
    simulate_tournament,
)

__all__ = [
    'generate_sample_names',
    'simulate_elimination',
    'simulate_round',
    'simulate_tournament',
]
