"""Analysis client, response parsing, orchestration and reporting."""
