"""Storage interfaces for the domain aggregates."""

from __future__ import annotations

from abc import ABC, abstractmethod

from autops.common.identifier import Identifier
from autops.common.tag import Tag
from autops.identity.user import User
from autops.policy.policy import Policy
from autops.project.project import Project
from autops.template.template import Template
from autops.workflow.workflow import Workflow


class UserRepository(ABC):
    """Persistence of users."""

    @abstractmethod
    def create(self, user: User) -> None: ...

    @abstractmethod
    def update(self, user: User) -> None: ...

    @abstractmethod
    def delete(self, user_id: Identifier) -> None: ...

    @abstractmethod
    def find_by_id(self, user_id: Identifier, offset: int, limit: int) -> User | None: ...

    @abstractmethod
    def find_all(self, offset: int, limit: int) -> list[User]: ...

    @abstractmethod
    def find_by_username(self, username: str, offset: int, limit: int) -> User | None: ...

    @abstractmethod
    def find_by_email(self, email: str, offset: int, limit: int) -> User | None: ...


class PolicyRepository(ABC):
    """Persistence of policies and their attachment to entities."""

    @abstractmethod
    def create(self, policy: Policy) -> None: ...

    @abstractmethod
    def update(self, policy: Policy) -> None: ...

    @abstractmethod
    def delete(self, policy_id: Identifier) -> None: ...

    @abstractmethod
    def find_by_id(self, policy_id: Identifier) -> Policy | None: ...

    @abstractmethod
    def find_all(self, offset: int, limit: int) -> list[Policy]: ...

    @abstractmethod
    def find_by_entity(self, entity_id: Identifier, offset: int, limit: int) -> list[Policy]: ...

    @abstractmethod
    def attach_to_entity(self, policy_id: Identifier, entity_id: Identifier) -> None: ...

    @abstractmethod
    def detach_from_entity(self, policy_id: Identifier, entity_id: Identifier) -> None: ...

    @abstractmethod
    def find_with_all_tags(self, tags: list[Tag], offset: int, limit: int) -> list[Policy]: ...

    @abstractmethod
    def find_with_any_tags(self, tags: list[Tag], offset: int, limit: int) -> list[Policy]: ...


class ProjectRepository(ABC):
    """Persistence of projects."""

    @abstractmethod
    def create(self, project: Project) -> None: ...

    @abstractmethod
    def update(self, project: Project) -> None: ...

    @abstractmethod
    def delete(self, project_id: Identifier) -> None: ...

    @abstractmethod
    def find_by_id(self, project_id: Identifier) -> Project | None: ...

    @abstractmethod
    def find_all(self, offset: int, limit: int) -> list[Project]: ...

    @abstractmethod
    def find_with_all_tags(self, tags: list[Tag], offset: int, limit: int) -> list[Project]: ...

    @abstractmethod
    def find_with_any_tags(self, tags: list[Tag], offset: int, limit: int) -> list[Project]: ...


class TemplateRepository(ABC):
    """Persistence of templates and their versions."""

    @abstractmethod
    def create(self, template: Template) -> None: ...

    @abstractmethod
    def update(self, template: Template) -> None: ...

    @abstractmethod
    def delete(self, template_id: Identifier) -> None: ...

    @abstractmethod
    def find_by_project(
        self, project_id: Identifier, offset: int, limit: int
    ) -> list[Template]: ...

    @abstractmethod
    def find_all_versions(
        self, template_id: Identifier, offset: int, limit: int
    ) -> list[Template]: ...

    @abstractmethod
    def find_by_id(self, template_id: Identifier) -> Template | None: ...

    @abstractmethod
    def find_all(self, offset: int, limit: int) -> list[Template]: ...

    @abstractmethod
    def find_with_all_tags(self, tags: list[Tag], offset: int, limit: int) -> list[Template]: ...

    @abstractmethod
    def find_with_any_tags(self, tags: list[Tag], offset: int, limit: int) -> list[Template]: ...


class WorkflowRepository(ABC):
    """Persistence of workflows and their versions."""

    @abstractmethod
    def create(self, workflow: Workflow) -> None: ...

    @abstractmethod
    def update(self, workflow: Workflow) -> None: ...

    @abstractmethod
    def delete(self, workflow_id: Identifier) -> None: ...

    @abstractmethod
    def find_by_project(
        self, project_id: Identifier, offset: int, limit: int
    ) -> list[Workflow]: ...

    @abstractmethod
    def find_all_versions(
        self, workflow_id: Identifier, offset: int, limit: int
    ) -> list[Workflow]: ...

    @abstractmethod
    def find_by_id(self, workflow_id: Identifier) -> Workflow | None: ...

    @abstractmethod
    def find_all(self, offset: int, limit: int) -> list[Workflow]: ...

    @abstractmethod
    def find_with_all_tags(self, tags: list[Tag], offset: int, limit: int) -> list[Workflow]: ...

    @abstractmethod
    def find_with_any_tags(self, tags: list[Tag], offset: int, limit: int) -> list[Workflow]: ...