"""
The War card game: deck-exhaustion simulation with recursive wars.
"""
