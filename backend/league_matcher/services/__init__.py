"""
Services Layer

Pure matchmaking logic that:
- Accepts domain inputs (teams, conflict graph, config)
- Returns domain outputs (groups, pass results, run results)
- Does NOT depend on HTTP request/response objects or the CLI
- Mutates only the pool, interleave queue and schedule it is handed
"""
