"""Constants for license-auditor."""

# Exit codes
EXIT_SUCCESS = 0  # All dependencies passed the policy
EXIT_ISSUES = 1  # Non-approved licenses found
EXIT_ERROR = 2  # Audit failed due to error

# Exception entries ending with this marker cover every nested identifier
WILDCARD_MARKER = "/..."

# Attribution report layout
REPORT_HEADER = (
    "THE FOLLOWING SETS FORTH ATTRIBUTION NOTICES FOR THIRD PARTY SOFTWARE "
    "THAT MAY BE CONTAINED IN PORTIONS OF THIS PROJECT"
)
REPORT_ENTRY_TEMPLATE = (
    "\n\n---\n\n"
    "The following software may be included in this product: {dependency}. "
    "This software contains the following license and notice below:\n\n"
    "{text}\n"
)
