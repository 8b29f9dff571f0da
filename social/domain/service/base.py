"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the business rules that span aggregates (a user
    and its token ledger, two users in a like relation). They return
    ``social.domain.result`` values for expected failures.
    """

    pass
