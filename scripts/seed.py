import sys

from todo_app.client.api import TodoApiClient, TodoApiError
from todo_app.client.view import TodoListView
from todo_app.core.config import settings
from todo_app.core.logging import configure_logging

DEMO_TODOS = ["Buy milk", "Walk the dog", "Write the weekly report"]


def run_seed(base_url: str) -> int:
    with TodoApiClient(base_url) as api:
        try:
            api.health()
        except TodoApiError as exc:
            print(f"API unreachable at {base_url}: {exc.message}", file=sys.stderr)
            return 1

        view = TodoListView(api)
        for title in DEMO_TODOS:
            view.add(title)
        # 1er todo marqué comme fait pour avoir les deux compteurs
        if view.todos:
            view.toggle(view.todos[0].id)

        print("\n".join(view.render()))
        return 0 if view.mutation_error is None else 1


if __name__ == "__main__":
    configure_logging()
    sys.exit(run_seed(sys.argv[1] if len(sys.argv) > 1 else settings.API_URL))
