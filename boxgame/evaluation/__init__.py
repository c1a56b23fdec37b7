"""
Evaluation Package
==================

Contains the seed bank and the harness for playing many generated games.
"""

from boxgame.evaluation.run_eval import evaluate_seeds, load_seed_bank

__all__ = ["evaluate_seeds", "load_seed_bank"]
