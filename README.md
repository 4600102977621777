# starterkit

Small, self-contained command-line programs in one package:

| Command             | What it does                                      |
|---------------------|---------------------------------------------------|
| `starterkit-hello`  | Prints a greeting                                 |
| `starterkit-todo`   | Keeps a todo list in a JSON file                  |
| `starterkit-guess`  | A number guessing game with stats and high scores |
| `starterkit-server` | A small HTTP server with HTML pages and JSON APIs |

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Greeter

```
starterkit-hello                 # Hello, World
starterkit-hello --name Alice    # Hello, Alice
starterkit-hello -n Alice -v     # with verbose log lines
starterkit-hello --version
```

In code, `starterkit.hello.greeter.Greeter(GreeterConfig(name=...)).run()`
prints the greeting; `Greeter.greeting()` returns it as a string.

## Todo list

Tasks are stored as JSON in `tasks.json` in your home directory; the
directories `~/.todo` and `~/backups` are created when the list is first
read or written.

```
starterkit-todo add "Buy groceries"
starterkit-todo list
starterkit-todo list --pending
starterkit-todo list --completed
starterkit-todo list --priority high
starterkit-todo list --table --sort priority    # sort by priority, due or created
starterkit-todo done 1
starterkit-todo edit 1 "Buy groceries and cook dinner"
starterkit-todo search groceries
starterkit-todo remove 2
starterkit-todo stats
starterkit-todo version
starterkit-todo help
```

Short aliases: `a` (add), `ls`/`l` (list), `complete`/`d` (done),
`rm`/`r` (remove), `e` (edit), `s` (search), `v` (version), `h` (help).

Priorities are `low`, `medium` (the default for new tasks) and `high`, also
accepted as `l`/`m`/`h` or `1`/`2`/`3`. Output is coloured when written to a
terminal; set `NO_COLOR` to turn colour off or `FORCE_COLOR` to force it on.

The building blocks are usable on their own: `Task`, `TaskManager`,
`TaskFilter`, `JSONStorage` (with `create_backup`, `list_backups` and
`migrate_legacy_data`), `TaskFormatter` and `TableFormatter`.

## Number guessing game

```
starterkit-guess play                    # medium difficulty, 1-50
starterkit-guess play -d easy            # 1-10
starterkit-guess play -d hard -t 30      # 1-100 with a 30 second limit
starterkit-guess play -d custom          # 1-1000
starterkit-guess play -i false           # only "Too low!" / "Too high!" hints
starterkit-guess stats                   # games played, win rate, recent scores
starterkit-guess config                  # show the current settings
starterkit-guess reset                   # clear scores and statistics
```

Type `quit`, `exit` or `q` at the prompt to leave a game. Settings
(`config.json`), scores (`score.json`) and statistics (`stats.json`) live in
`~/.config/guess-game/`. The `config` command only shows the settings; to
change them, edit `config.json` or use `GameConfig.save`.

## HTTP server

```
starterkit-server                        # start with settings from the environment
starterkit-server server -p 9000 -e production -l debug
starterkit-server version
```

Settings are read from the environment (and from a `.env` file in the
current directory, if present; variables already set take precedence):

| Variable            | Default            |
|---------------------|--------------------|
| `PORT`              | `8080`             |
| `ENVIRONMENT`       | `development`      |
| `LOG_LEVEL`         | `info`             |
| `READ_TIMEOUT`      | `15s`              |
| `WRITE_TIMEOUT`     | `15s`              |
| `IDLE_TIMEOUT`      | `60s`              |
| `SHUTDOWN_TIMEOUT`  | `30s`              |
| `ENABLE_CORS`       | `true`             |
| `ENABLE_RATE_LIMIT` | `false`            |
| `RATE_LIMIT_RPS`    | `100`              |
| `STATIC_DIR`        | `./web/static`     |
| `TEMPLATE_DIR`      | `./web/templates`  |

Durations take forms such as `15s`, `1m30s` or `500ms`.

Routes: `/`, `/hello?name=...`, `/about`, `/api/info`, `/api/echo`,
`/api/time`, `/health`, `/ready` and static files under `/static/`.
The pages `/`, `/about` and not-found pages are rendered from
`index.html`, `about.html` and `error.html` in the template directory; a
template may use `{{.Title}}`, `{{.Message}}`, `{{.CurrentTime}}` and
`{{.Version}}`. Requests sent with `Accept: application/json` to an unknown
path get a JSON error instead.

In production the log is written as JSON lines; otherwise as key=value text.
The server stops cleanly on SIGINT or SIGTERM. The application itself is a
WSGI callable, `starterkit.webserver.app.WebApp`, and can be served by any
WSGI server.

## What is not included

There is no calculator in this package: the `starterkit.calc` sub-package is
empty and installs no command. Rate limiting is read from the settings but
not applied to requests.