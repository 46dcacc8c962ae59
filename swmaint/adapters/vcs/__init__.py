"""Version-control command builders."""
