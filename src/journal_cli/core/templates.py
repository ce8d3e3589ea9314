"""Fixed content written into a new journal."""

# Header line for each file placed directly under the journal root, in write order.
BOILERPLATE_FILES: dict[str, str] = {
    "README.md": "# README \n",
    "TODO.md": "# TODO (やるべきこと)\n",
    "CHANGELOG.md": "# CHANGELOG (実績)\n",
    "CONTRIBUTING.md": "# CONTRIBUTING (ガイドライン)\n",
}

# Kolb reflective cycle. "{}" is replaced with the entry date.
JOURNAL_TEMPLATE = """# {}

## Concrete Experience (具体的経験)

## Reflective Observation (省察)

## Abstract Conceptualization (概念化):

## Active Experimentation (試行):

"""
