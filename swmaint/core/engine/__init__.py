"""Engine — per-entry phases and the pipeline that drives them."""
