from lit_modelfile.parser import Command, format_command, format_commands


def test_format_parameter() -> None:
    assert format_commands([Command("temperature", "0.7")]) == "PARAMETER temperature 0.7\n"


def test_format_from_is_raw() -> None:
    assert format_command(Command("model", " /path with space ")) == "FROM  /path with space "


def test_format_metadata_directives() -> None:
    commands = [
        Command("license", "MIT"),
        Command("template", "{{ .Prompt }}"),
        Command("system", "line1\nline2"),
        Command("adapter", "./lora.gguf"),
    ]
    assert format_commands(commands) == (
        'LICENSE MIT\nTEMPLATE {{ .Prompt }}\nSYSTEM "line1\nline2"\nADAPTER ./lora.gguf\n'
    )


def test_format_triple_quotes_when_value_has_quotes() -> None:
    assert format_command(Command("system", 'say\n"hi"')) == 'SYSTEM """say\n"hi""""'


def test_format_message() -> None:
    assert format_command(Command("message", "user: Hello there")) == "MESSAGE user Hello there"
    assert format_command(Command("message", "assistant: a: b")) == "MESSAGE assistant a: b"
    assert format_command(Command("message", "user: \nhi")) == 'MESSAGE user "\nhi"'


def test_format_keeps_order() -> None:
    commands = [Command("model", "llama"), Command("stop", "<|a|>"), Command("stop", "<|b|>")]
    assert format_commands(commands).splitlines() == [
        "FROM llama",
        "PARAMETER stop <|a|>",
        "PARAMETER stop <|b|>",
    ]


def test_format_empty() -> None:
    assert format_commands([]) == ""


def test_format_does_not_validate() -> None:
    assert format_command(Command("message", "robot: beep")) == "MESSAGE robot beep"


def test_format_empty_values_are_quoted() -> None:
    commands = [
        Command("model", ""),
        Command("system", ""),
        Command("seed", ""),
        Command("message", "user: "),
    ]
    assert format_commands(commands) == 'FROM ""\nSYSTEM ""\nPARAMETER seed ""\nMESSAGE user ""\n'
