"""Job board service: candidates, companies, jobs and job applications."""
