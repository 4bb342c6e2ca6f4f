from foyer.models.university import University

__all__ = ["University"]
