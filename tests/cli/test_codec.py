import json


def test_encode_with_properties(invoke):
    res = invoke(["encode", "notice", "Deployed", "-p", "b=2", "-p", "a=x:y"])
    assert res.exit_code == 0
    assert res.output == "::notice b=2,a=x%3Ay::Deployed\n"


def test_encode_bare(invoke):
    assert invoke(["encode", "endgroup"]).output == "::endgroup::\n"


def test_encode_bad_property(invoke):
    res = invoke(["encode", "x", "m", "-p", "novalue"])
    assert res.exit_code != 0
    assert "Expected KEY=VALUE" in res.output


def test_encode_empty_name(invoke):
    res = invoke(["encode", ""])
    assert res.exit_code == 1
    assert "Error:" in res.output


def test_decode(invoke):
    data = "starting\n::set-output name=a%3Ab::x%0Ay\n::endgroup::\n"
    res = invoke(["decode"], input_data=data)
    assert res.exit_code == 0
    records = [json.loads(line) for line in res.output.strip().split("\n")]
    assert records == [
        {"command": "set-output", "properties": {"name": "a:b"}, "message": "x\ny"},
        {"command": "endgroup", "properties": {}, "message": ""},
    ]


def test_decode_all(invoke):
    res = invoke(["decode", "--all"], input_data="hello\n::debug::d\n")
    records = [json.loads(line) for line in res.output.strip().split("\n")]
    assert records[0] == {"log": "hello"}
    assert records[1]["command"] == "debug"


def test_encode_decode_pipeline(invoke):
    encoded = invoke(["set-output", "report", "100%, done:\nok"]).output
    res = invoke(["decode"], input_data=encoded)
    record = json.loads(res.output)
    assert record["properties"] == {"name": "report"}
    assert record["message"] == "100%, done:\nok"


def test_encode_empty_property_key(invoke):
    res = invoke(["encode", "x", "m", "-p", "=value"])
    assert res.exit_code != 0
    assert "Property key cannot be empty" in res.output
    assert "::x" not in res.output
