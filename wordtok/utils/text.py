def reduce_lengthening(text: str) -> str:
    """Collapse any run of the same non-numeric char to at most 3 ("cooooool" -> "coool")."""
    out = []
    last = None
    run = 0
    for ch in text:
        if ch == last and not ch.isnumeric():
            run += 1
        else:
            run = 0
            last = ch
        if run < 3:
            out.append(ch)
    return "".join(out)
