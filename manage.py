import sys

from main import main as run_app
from moderation_api.commands import run_cleanup, run_init_db


FUNCTIONS_FOR_RUNNING = {
    'run_app': run_app,
    'init_db': run_init_db,
    'cleanup': run_cleanup,
}


if __name__ == '__main__':
    if len(sys.argv) != 2:
        raise SystemExit(f'usage: {sys.argv[0]} {{{",".join(FUNCTIONS_FOR_RUNNING)}}}')

    if sys.argv[1] in FUNCTIONS_FOR_RUNNING:
        func = FUNCTIONS_FOR_RUNNING[sys.argv[1]]
        func()
    else:
        raise SystemExit(f'function with name {sys.argv[1]} doesnt exists')
