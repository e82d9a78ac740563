"""
Job statuses resource.

Bulk operations hand back a :class:`JobStatus` describing work queued on the
Zendesk side. This client fetches a status on request; it never waits for a
job to finish.
"""

from urllib.parse import quote

from zendesk_rest.models import JobStatus, decode_job_status
from zendesk_rest.monitoring import timed_api_call
from zendesk_rest.resources.base import Resource


class JobStatuses(Resource):

    @timed_api_call("job_statuses")
    def show(self, job_id: str) -> JobStatus:
        """Fetch the current state of a bulk job once."""
        return decode_job_status(
            self.http.get(f"/api/v2/job_statuses/{quote(str(job_id), safe='')}.json")
        )
