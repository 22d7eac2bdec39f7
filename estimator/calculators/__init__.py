"""
Deterministic quantity / pricing engine.

Pure Python math. No I/O.
Given a material row's geometry, waste % and catalog item,
produce a Row: qty_raw, qty_final, unit, unit_price, subtotal.
"""
