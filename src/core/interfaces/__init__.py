"""Interfaces/abstracciones del Core.

Contratos (Protocol) que implementan los adaptadores concretos, de modo que
el Core depende de abstracciones y los tests pueden inyectar stubs.
"""
