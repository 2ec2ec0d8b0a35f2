"""
Airway Router - illustrative flight route generation.

Resolves airports, fixes, navaids and airways from an injected reference
data provider, assembles a waypoint sequence along one airway and reports
great-circle distance and estimated flight time.
"""
