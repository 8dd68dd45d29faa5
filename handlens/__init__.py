"""
HandLens: Hold'em Hand Analysis

Evaluates a hand in progress from a snapshot of the table: best-hand
classification, preflop chart strength, outs and drawing odds, pot and
implied odds, and a sampled win probability against a random hand.
"""

__version__ = "0.1.0"
