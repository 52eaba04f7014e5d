"""Species domain package.

Species records keyed by scientific name, the observations attached to them,
and the identity resolver that writes both.

Components should be imported directly from their modules:
from florascan.species.resolver import SpeciesIdentityResolver
"""
