"""Word list sampling, sorting and nêhiyawêwin/English digraph classification."""
