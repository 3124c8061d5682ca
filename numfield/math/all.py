from .general import *
from .matrix import hermite_normal_form, integer_kernel, lattice_intersection, rational_solve
from .multivariate_polynomial import x, dim_symbol, make_multivariate, make_univariate, qqx
from .algebra.fields.number_field import NumberField, NumberFieldElement, QuadraticField, CyclotomicField
from .algebra.fields.splitting_field import primitive_elem, splitting_field
from .algebra.rings.ideal import Ideal, FractionalIdeal
from .algebra.rings.order import Order, OrderElement
from .algebra.rings.polynomial_ring import FieldPolynomial, FieldPolynomialRing
