"""Todo list manager backed by a JSON file."""