"""Routing context for the in-flight request."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouteContext:
    """Directory, controller, and action that handled the current request.

    ``directory`` is the optional sub-directory segment some routers put in
    front of the controller (``admin`` for ``admin/users/edit``).
    """

    controller: str
    action: str
    directory: str = ""

    @property
    def controller_key(self) -> str:
        """Key under ``pages`` in the client config.

        ``"{directory}_{controller}"`` when a directory is set, else the
        bare controller name.
        """
        if self.directory:
            return f"{self.directory}_{self.controller}"
        return self.controller

    @classmethod
    def from_path(cls, path: str, *, default_action: str = "index") -> "RouteContext":
        """Parse ``"[directory/]controller[/action]"`` into a context.

        Examples::

            RouteContext.from_path("welcome")            # welcome / index
            RouteContext.from_path("welcome/about")      # welcome / about
            RouteContext.from_path("admin/users/edit")   # admin_users / edit
        """
        parts = [p for p in path.strip("/").split("/") if p]
        if not parts:
            msg = f"Cannot build a route context from {path!r}"
            raise ValueError(msg)
        if len(parts) == 1:
            return cls(controller=parts[0], action=default_action)
        if len(parts) == 2:
            return cls(controller=parts[0], action=parts[1])
        return cls(
            directory="/".join(parts[:-2]),
            controller=parts[-2],
            action=parts[-1],
        )
