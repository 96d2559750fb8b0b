"""
Emissions estimation: turns an ActivityInput into an EmissionsBreakdown.

Modules
-------
factors   : Fixed per-unit emission factors and the diet lookup table.
emissions : EmissionComponents dataclass + estimate_components() +
            estimate() — pure functions, no I/O.
benchmark : severity_level() + compare_to_average() + category_shares() +
            assess() — grading a breakdown against typical households.
"""
