"""
Adapter implementations for the flight planner.

Adapters are concrete implementations of the port interfaces.
They handle the specifics of data sources, the network and algorithms.
"""
