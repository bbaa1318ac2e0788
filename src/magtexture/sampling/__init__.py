from .sampler import cell_coordinates, sample, sample_normalized

__all__ = ["cell_coordinates", "sample", "sample_normalized"]
