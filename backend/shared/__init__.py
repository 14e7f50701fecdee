"""
Shared module for common utilities used by the REST API.

CLEAN ARCHITECTURE STRUCTURE:
- shared.infrastructure: Database and request plumbing
  - db.py: SQLAlchemy engines and sessions (catalog + audit), safe_commit()
  - correlation.py: X-Request-ID middleware and logging filter

- shared.config: Configuration
  - settings.py: Environment config (Pydantic)
  - logging.py: Structured logging
  - constants.py: EntityType, AuditAction, Messages, limits

- shared.utils: Utilities
  - exceptions.py: HTTP exceptions with auto-logging and an ErrorKind
  - validators.py: Validation rule sets
  - schemas.py: Transfer objects and pagination envelopes

IMPORT EXAMPLES:
    from shared.infrastructure.db import get_db, safe_commit
    from shared.config.settings import settings
    from shared.config.constants import EntityType, Messages
    from shared.utils.exceptions import NotFoundError, ValidationError
    from shared.utils.validators import Validator, title_rules
"""

# This module does not provide re-exports.
# All imports should use the canonical paths as documented above.
