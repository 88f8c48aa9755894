"""TEI P5 document assembly and formatting."""
