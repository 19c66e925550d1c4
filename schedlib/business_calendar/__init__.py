"""Tenor arithmetic, business day adjustment and spot date helpers."""
