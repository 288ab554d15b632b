from lanesync.adapters.http.projects import ProjectsApi, ProjectsApiError

__all__ = ["ProjectsApi", "ProjectsApiError"]
