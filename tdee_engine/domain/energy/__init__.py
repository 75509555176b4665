"""Energy expenditure domain: BMR, TDEE, weight-loss targets and macros."""
