"""
FX Treasury Risk Engine
=======================
Deterministic USD/MYR treasury risk model implementing:
- Synthetic FX exposure book generation
- Interest-rate shock to FX rate mapping
- Unhedged and hedged P&L
- Forward hedge cost and optimal hedge ratio
- Parametric (Variance-Covariance) VaR
- P&L sensitivity curves
"""

__version__ = "1.0.0"
