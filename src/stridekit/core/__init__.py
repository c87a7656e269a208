"""
Core stride primitives: measurable value contract, step policies,
and stride sequences.

Модули не зависят от внешних систем и не выполняют I/O.
"""
