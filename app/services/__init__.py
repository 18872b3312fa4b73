"""
Services for DevConnector API
"""
from app.services.profile_service import ProfileService
from app.services.github_service import GitHubService, GitHubProfileNotFound, get_github_service

__all__ = ["ProfileService", "GitHubService", "GitHubProfileNotFound", "get_github_service"]
