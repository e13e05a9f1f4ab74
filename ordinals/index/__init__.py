"""Fixed-width storage formats and sat-range bookkeeping for an inscription index."""