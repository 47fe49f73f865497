"""
Bond Warrant Scenario Engine

Modules:
- bonds: flat-yield annual-coupon bond pricing
- distributions: standard normal CDF/PDF
- options: Black-Scholes warrant valuation on the bond price
- greeks: delta/gamma/vega/theta/rho
- risk: heuristic duration + expected price change
- position: investment, position value, P&L
- breakeven: bracketed break-even rate search
- simulation: single-scenario runner + payoff table
- scenarios: rate/time/vol sweeps across saved operations
- serialization: record/JSON form of scenarios and results
- rates: rate-provider interface used to seed market inputs

Entry points are simulation.run_simulation and scenarios.sweep.
"""
