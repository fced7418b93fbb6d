from jobify.app.models.job import Job
