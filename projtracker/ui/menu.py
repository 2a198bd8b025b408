"""Interactive text menu."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Final

from projtracker.exc import DbException, DbUnavailable, DoesNotExist, InvalidInput
from projtracker.models import Project
from projtracker.services import ProjectsService
from projtracker.utils import to_fixed_point

logger = logging.getLogger(__name__)

#: Errors reported to the user without leaving the menu.
REPORTED_ERRORS: Final = (DoesNotExist, DbException, DbUnavailable, InvalidInput)


@dataclass
class MenuState:
    """
    What the user is working on.

    The menu passes this to every handler; nothing below the menu reads it.
    """

    #: The project selected with "Select a project", if any.
    current_project: Project | None = None


def format_project(project: Project) -> str:
    """
    Render a project and its child rows for display.

    Args:
        project: The project to render

    Returns:
        A multi-line string

    """
    lines = [
        f"   ID={project.project_id}",
        f"   name={project.project_name}",
        f"   estimatedHours={project.estimated_hours}",
        f"   actualHours={project.actual_hours}",
        f"   difficulty={project.difficulty}",
        f"   notes={project.notes}",
        "   Materials:",
        *(f"      {material}" for material in project.materials),
        "   Steps:",
        *(f"      {step}" for step in project.steps),
        "   Categories:",
        *(f"      {category}" for category in project.categories),
    ]
    return "\n".join(lines)


class ProjectsMenu:
    """
    The interactive project menu.

    Args:
        service: The service every operation goes through

    Keyword Args:
        input_func: Reads one line of user input given a prompt
        output: Writes one message to the user

    """

    #: The menu operations, in display order.
    OPERATIONS: Final[tuple[str, ...]] = (
        "1) Add a project",
        "2) List projects",
        "3) Select a project",
        "4) Update project details",
        "5) Delete a project",
    )

    def __init__(
        self,
        service: ProjectsService,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        #: The projects service.
        self.service = service
        #: Reads user input.
        self.input_func = input_func
        #: Writes output.
        self.output = output
        #: Menu selection number to handler.
        self.handlers: dict[int, Callable[[MenuState], None]] = {
            1: self.create_project,
            2: self.list_projects,
            3: self.select_project,
            4: self.update_project_details,
            5: self.delete_project,
        }

    def run(self, state: MenuState | None = None) -> MenuState:
        """
        Show the menu until the user enters a blank selection.

        Args:
            state: The state to start from; a fresh one if ``None``

        Returns:
            The state as the user left it

        """
        if state is None:
            state = MenuState()
        while True:
            try:
                selection = self.get_user_selection(state)
                if selection is None:
                    self.output("Exiting the menu.")
                    return state
                handler = self.handlers.get(selection)
                if handler is None:
                    self.output(f"\n{selection} is not a valid selection. Try again.")
                    continue
                handler(state)
            except EOFError:
                self.output("Exiting the menu.")
                return state
            except REPORTED_ERRORS as e:
                logger.debug("Menu operation failed", exc_info=True)
                self.output(f"\nError: {e} Try again.")

    # ---------- operations ----------

    def create_project(self, state: MenuState) -> None:  # noqa: ARG002
        """Prompt for the project fields and add the project."""
        project = Project(
            project_name=self.get_string_input("Enter the project name"),
            estimated_hours=self.get_decimal_input("Enter the estimated hours"),
            actual_hours=self.get_decimal_input("Enter the actual hours"),
            difficulty=self.get_int_input("Enter the project difficulty (1-5)"),
            notes=self.get_string_input("Enter the project notes"),
        )
        db_project = self.service.add_project(project)
        self.output(f"You have successfully created project: {db_project}")

    def list_projects(self, state: MenuState) -> None:  # noqa: ARG002
        """Print every project's ID and name."""
        projects = self.service.fetch_all_projects()
        self.output("\nProjects:")
        for project in projects:
            self.output(f"   {project.project_id}: {project.project_name}")

    def select_project(self, state: MenuState) -> None:
        """Ask for a project ID and make that project the current one."""
        self.list_projects(state)
        project_id = self.get_int_input("Enter a project ID to select a project")
        # Unselect first, so a failed lookup leaves nothing selected
        state.current_project = None
        if project_id is None:
            return
        state.current_project = self.service.fetch_project_by_id(project_id)
        self.output(
            f"You are working with project:\n{format_project(state.current_project)}"
        )

    def update_project_details(self, state: MenuState) -> None:
        """
        Prompt for new values for the current project's details.

        A blank answer keeps the current value.  The selection is refreshed
        from the store afterwards.
        """
        current = state.current_project
        if current is None:
            self.output("\nPlease select a project.")
            return
        name = self.get_string_input(f"Enter the project name [{current.project_name}]")
        estimated = self.get_decimal_input(
            f"Enter the estimated hours [{current.estimated_hours}]"
        )
        actual = self.get_decimal_input(
            f"Enter the actual hours [{current.actual_hours}]"
        )
        difficulty = self.get_int_input(
            f"Enter the project difficulty (1-5) [{current.difficulty}]"
        )
        notes = self.get_string_input(f"Enter the project notes [{current.notes}]")
        project = replace(
            current,
            project_name=current.project_name if name is None else name,
            estimated_hours=current.estimated_hours if estimated is None else estimated,
            actual_hours=current.actual_hours if actual is None else actual,
            difficulty=current.difficulty if difficulty is None else difficulty,
            notes=current.notes if notes is None else notes,
        )
        self.service.modify_project_details(project)
        state.current_project = self.service.fetch_project_by_id(
            current.project_id  # type: ignore[arg-type]
        )
        self.output(f"Updated project: {state.current_project}")

    def delete_project(self, state: MenuState) -> None:
        """Ask for a project ID and delete that project."""
        self.list_projects(state)
        project_id = self.get_int_input("Enter the ID of the project to delete")
        if project_id is None:
            return
        self.service.delete_project(project_id)
        self.output(f"Project {project_id} was deleted successfully.")
        if state.current_project is not None and (
            state.current_project.project_id == project_id
        ):
            state.current_project = None

    # ---------- input ----------

    def get_user_selection(self, state: MenuState) -> int | None:
        """Print the operations and read a selection; ``None`` means quit."""
        self.print_operations(state)
        return self.get_int_input("Enter a menu selection")

    def print_operations(self, state: MenuState) -> None:
        """Print the menu and what the user is working on."""
        self.output(
            "\nThese are the available selections. Press the Enter key to quit:"
        )
        for line in self.OPERATIONS:
            self.output(f"   {line}")
        if state.current_project is None:
            self.output("\nYou are not working with a project.")
        else:
            self.output(f"\nYou are working with project: {state.current_project}")

    def get_string_input(self, prompt: str) -> str | None:
        """
        Read a line; blank answers become ``None``.

        Raises:
            EOFError: input is exhausted

        """
        value = self.input_func(f"{prompt}: ")
        return None if not value.strip() else value.strip()

    def get_int_input(self, prompt: str) -> int | None:
        """Read a whole number; blank answers become ``None``."""
        value = self.get_string_input(prompt)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            raise InvalidInput(value) from None

    def get_decimal_input(self, prompt: str) -> Decimal | None:
        """Read a decimal rounded to two places; blank answers become ``None``."""
        value = self.get_string_input(prompt)
        if value is None:
            return None
        try:
            return to_fixed_point(value)
        except ValueError:
            raise InvalidInput(value, "decimal number") from None
