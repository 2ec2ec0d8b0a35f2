"""
Adapter implementations for the Airway Router.

Adapters are concrete implementations of the port interfaces.
They handle the specifics of data sources, weather services and
selection/latency strategies.
"""
