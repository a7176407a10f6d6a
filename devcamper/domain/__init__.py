"""
Domain layer package.

Contains entities, port interfaces, domain errors and the geo math
used by radius search. This layer has ZERO external dependencies.
No framework imports, no IO, no side effects.
"""
