# ---- Captured terminal output samples ----

# Minimal two-column table with a header separator row
SIMPLE_TABLE = (
    "┌──┬──┐\n"
    "│ A │ B │\n"
    "├──┼──┤\n"
    "│ 1 │ 2 │\n"
    "└──┴──┘"
)

SIMPLE_TABLE_MD = (
    "| A | B |\n"
    "| --- | --- |\n"
    "| 1 | 2 |"
)

# Report with every construct the converter knows about
REPORT = "\n".join([
    "Build Report",
    "",
    "✅ Wins:",
    "• Tests pass",
    "- Lint clean",
    "",
    "──────────",
    "",
    "┌──────┬───────┐",
    "│ Name │ Value │",
    "├──────┼───────┤",
    "│ cpu  │ 12%   │",
    "│ mem  │       │",
    "└──────┴───────┘",
    "",
    "Next Steps",
    "",
    "Deploy to staging tomorrow.",
    "Then monitor the dashboards.",
])

REPORT_MD = "\n".join([
    "# Build Report",
    "",
    "**✅ Wins:**",
    "- Tests pass",
    "- Lint clean",
    "",
    "---",
    "",
    "| Name | Value |",
    "| --- | --- |",
    "| cpu | 12% |",
    "| mem |  |",
    "",
    "",
    "## Next Steps",
    "",
    "Deploy to staging tomorrow.",
    "Then monitor the dashboards.",
])

# Top border that is never closed
UNCLOSED_TABLE = (
    "┌──┬──┐\n"
    "│ A │ B │\n"
    "after the table"
)
