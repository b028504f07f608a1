from patternkit.proxy import (
    CarMachine,
    ComputerProxy,
    Machine,
    SmartPhoneMachine,
    demo_car,
    demo_smartphone,
    main,
)


class _Recorder(Machine):
    def __init__(self, result):
        self.calls = []
        self.result = result

    def boot(self):
        self.calls.append("boot")

    def start(self):
        self.calls.append("start")
        return self.result


def test_car_machine(capsys):
    car = CarMachine()
    car.boot()
    assert car.start() is True
    assert capsys.readouterr().out == "boot the car\nstart the car\n"


def test_smartphone_machine(capsys):
    phone = SmartPhoneMachine()
    phone.boot()
    assert phone.start() is True
    assert capsys.readouterr().out == "boot the smartphone\nstart the smartphone\n"


def test_proxy_forwards_calls_in_order():
    recorder = _Recorder(result=True)
    proxy = ComputerProxy(recorder)
    proxy.boot()
    proxy.start()
    assert recorder.calls == ["boot", "start"]


def test_proxy_passes_start_result_through():
    assert ComputerProxy(_Recorder(result=False)).start() is False


def test_demo_car_output(capsys):
    demo_car()
    assert capsys.readouterr().out.splitlines() == [
        "Begin TestCar",
        "boot the car",
        "start the car",
        "End TestCar",
    ]


def test_demo_smartphone_output(capsys):
    demo_smartphone()
    assert capsys.readouterr().out.splitlines() == [
        "Begin TestSmartPhone",
        "boot the smartphone",
        "start the smartphone",
        "End TestSmartPhone",
    ]


def test_main_runs_both_demos(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Begin TestCar"
    assert lines[-1] == "End TestSmartPhone"
    assert len(lines) == 8