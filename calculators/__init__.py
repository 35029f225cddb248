"""
Calculators Package

Road tax calculation for Malaysian private vehicles.

Modules:
- road_tax: Entry points (single, boundary, batch, rate schedule)
- road_tax_models: Region, request/result types, errors
- road_tax_config: Rate tables
- tax_calculators: Region-specific calculators and registry

Copyright (c) 2026 Andre. All rights reserved.
"""

__all__ = ['road_tax', 'road_tax_models', 'road_tax_config', 'tax_calculators']
