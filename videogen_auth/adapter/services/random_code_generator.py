import secrets

from videogen_auth.app.services.code_generator import ICodeGenerator

CODE_MIN = 100000
CODE_MAX = 999999


class RandomCodeGenerator(ICodeGenerator):
    """Uniform 6-digit codes in [100000, 999999] from the OS CSPRNG"""

    def generate(self) -> str:
        return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1))
