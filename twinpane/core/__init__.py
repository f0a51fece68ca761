"""Runtime plumbing: actions, config, errors, curses loop and collaborators."""
