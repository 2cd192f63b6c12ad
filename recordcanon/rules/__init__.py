"""Rule store package.

Holds the configurable pattern/word lists (legal suffixes, filler words,
office designations, street suffixes, direction map) used by the company
and address canonicalizers, with a compiled-in default for every rule.
"""
