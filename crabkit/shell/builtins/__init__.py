"""Character counters and the count table for a wc-style command."""