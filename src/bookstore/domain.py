"""Domain initialization and configuration."""

from protean.domain import Domain

from bookstore.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
bookstore = Domain(name="bookstore")
