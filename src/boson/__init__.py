"""
Boson Protocol domain entities, contract validators and big-number primitives.

This package has no network or persistence code: it only represents and
validates records exchanged with the protocol contracts.
"""
