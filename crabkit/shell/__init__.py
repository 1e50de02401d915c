"""Shell building blocks: character counters, count tables, variables and command-line types."""