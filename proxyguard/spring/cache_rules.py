"""Rules for Spring's declarative cache abstraction."""

from ..rules import ArchRule, methods
from . import annotations as sa
from .component_predicates import spring_annotated_with
from .proxy_rules import not_be_called_from_within_the_same_class

CACHEABLE_METHOD_NOT_CALLED_FROM_SAME_CLASS: ArchRule = (
    methods()
    .that(spring_annotated_with(sa.CACHEABLE))
    .should(not_be_called_from_within_the_same_class())
    .named("cacheable-not-called-from-same-class")
)
"""Methods annotated with ``@Cacheable`` must not be called from their own class.

Such internal calls bypass Spring's proxy, so nothing is cached::

    public class BookService {

        @Cacheable("books")
        public Book findBook(String isbn) {
            return database.findBook(isbn);
        }

        public String findBookTitle(String isbn) {
            Book book = findBook(isbn); // bypasses the caching proxy
            return book.getTitle();
        }
    }

Only meaningful when caching runs in proxy mode (see ``@EnableCaching``).
"""
