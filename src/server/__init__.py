"""HTTP server for ideagraph."""
