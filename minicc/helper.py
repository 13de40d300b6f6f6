def error_message(expression: str, location: int, message: str) -> str:
    line_start = expression.rfind("\n", 0, location) + 1
    line_end = expression.find("\n", location)
    if line_end == -1:
        line_end = len(expression)
    line = expression[line_start:line_end]
    messages = [f"{line}\n", f"{' ' * (location - line_start)}^ {message}\n"]
    return "".join(messages)
