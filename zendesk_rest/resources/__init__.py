from zendesk_rest.resources.job_statuses import JobStatuses
from zendesk_rest.resources.tickets import Tickets, desc_to_comment
from zendesk_rest.resources.users import Users

__all__ = ["JobStatuses", "Tickets", "Users", "desc_to_comment"]
