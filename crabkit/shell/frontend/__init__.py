"""Shell variables and the types that describe a parsed command line."""