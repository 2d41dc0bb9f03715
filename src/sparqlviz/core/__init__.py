"""Query AST → graph model core."""
