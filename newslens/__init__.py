"""newslens: detect trending stories across news outlets."""
