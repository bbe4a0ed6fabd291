from .pint_setup import UNITS, Quantity
