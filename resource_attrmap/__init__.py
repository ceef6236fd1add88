"""Resource attribute mapping for AWS attribute APIs.

Translates between typed, change-tracked resource fields and the flat
string attribute maps used by APIs such as SQS queue and SNS topic
attributes.
"""

from resource_attrmap.core.version import __version__

__all__ = ["__version__"]
