from abc import ABC, abstractmethod


class QueryInterface(ABC):
    @abstractmethod
    def build_query(self) -> str:
        """
        Assemble the complete GraphQL query string.

        The query is built from the builder's class name, its arguments in a
        fixed order and its field selection. Arguments that are not set are
        left out, and the argument list is dropped entirely when empty.

        Returns:
            The query string, ready to be sent as the `query` member of a
            GraphQL request body

        Raises:
            ValueError: If mandatory parts of the query are missing
        """
        pass

    def __str__(self) -> str:
        return self.build_query()
