"""Built-in YAML syntax definitions, grouped by language name."""