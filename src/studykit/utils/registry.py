from studykit.utils.utils import demosRegister


def register_demo(name: str):
    return demosRegister.register(name)
