# Plyra namespace package — lets plyra-scope share the "plyra" namespace
# with the other plyra-* distributions.
#
# See: https://packaging.python.org/en/latest/guides/packaging-namespace-packages/
from pkgutil import extend_path

__path__ = extend_path(__path__, __name__)
