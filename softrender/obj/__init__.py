"""Data types and line helpers for Wavefront OBJ and MTL content."""