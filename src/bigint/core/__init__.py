"""
Core: представление, алгоритмы и инварианты BigInteger.

Модуль не зависит от внешних систем и не выполняет I/O, кроме загрузки
reference vectors из contracts/.
"""
