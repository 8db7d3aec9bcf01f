from terminal_quiz.cli import app

app(prog_name="terminal-quiz")
