"""
Adapter implementations for the Flight Network engine.

Adapters are concrete implementations of the port interfaces.
Each one binds a port to a concrete backend.
"""
