"""
Input boundary: reading submitted activity records from disk and checking
them before they reach the estimator.

Modules:
  activity_file — load_activity_file() + parse_activity() +
                  validate_activity() + ActivityInputError.
"""
