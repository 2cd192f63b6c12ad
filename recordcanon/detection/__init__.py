"""Category detection package.

Decides which record category an unlabeled value belongs to, using a
fixed, priority-ordered cascade of pattern tests.
"""
