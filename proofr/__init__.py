"""First-order logic, normal forms, clausification and clause saturation."""

__version__ = "0.1.0"
__all__ = ["fol", "normal_forms", "clausify", "sup", "saturation"]