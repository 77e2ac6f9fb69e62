"""File extension constants used when locating and rewriting source files."""

# Extensions allowed for project entry points (without leading dot)
ENTRYPOINT_EXTENSIONS = ("ts", "mts", "cts", "mjs", "cjs", "js", "tsx", "jsx")

# Base names for the main export file of a project
PRIMARY_ENTRY_BASE_NAMES = ("public-api", "index")

# TypeScript and JavaScript source files processed during import updates
SOURCE_FILE_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx", ".mts", ".mjs", ".cts", ".cjs")

# Extensions dropped from import specifiers. ESM-only extensions are required
# by the module resolution rules and stay.
STRIPPABLE_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx")
