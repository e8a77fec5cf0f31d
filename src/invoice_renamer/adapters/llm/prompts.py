"""Shared LLM prompts for invoice extraction."""

SYSTEM_PROMPT = "Jesteś ekspertem od ekstrakcji danych z faktur PDF."

BASE_INSTRUCTIONS = """\
Twoje zadanie: odczytaj treść faktury (PDF) i zwróć:
- issueDate: data wystawienia w formacie RRMMDD (rok dwa cyfry, miesiąc dwa, dzień dwa) – jeśli brak pewności, oszacuj na podstawie kontekstu i zaznacz w polu issuerName "(niepewne)".
- issuerName: nazwa wystawcy znormalizowana według zasad poniżej.

Zasady dla issuerName:
- jeśli w pełnej nazwie pojawia się sieć stacji benzynowych (np. Shell, Orlen, BP), zwróć tylko nazwę sieci.
- usuń nadmiarowe elementy typu sp. z o.o., S.A., numer oddziału itp., chyba że to jedyna informacja identyfikująca.
- jeżeli brak rozpoznawalnej nazwy, zwróć użyteczne skrócone określenie, np. "Sklep spożywczy".
- jeżeli w nazwie mamy formę działalności - np. sp. z o.o., S.A., przedsiębiorstwo wielobranżowe czy FHU - zwróć tylko nazwę wystawcy z pominięciem formy działalności.
- jeżeli faktura dotyczy stacji benzynowych - sprawdź jaki rodzaj paliwa jest na fakturze. W przypadku PB95 (benzyny bezołowiowej) - dodaj do nazwy pliku Mazda. Jeżeli na fakturze jest ON (olej napędowy diesel) - dodaj do nazwy pliku Mercedes.
- jeżeli faktura dotyczy noclegu (w jakimkolwiek języku) - dodaj do nazwy pliku hotel.

Wyjściowy format JSON:
{
  "issueDate": "RRMMDD",
  "issuerName": "..."
}"""

EXAMPLES_HEADER = "Przykłady transformacji nazwy:"


def build_instructions(examples: str | None = None) -> str:
    """Return the extraction instructions, with few-shot examples if given.

    Examples are "source => target" lines and are appended verbatim.
    """
    if examples and examples.strip():
        return f"{BASE_INSTRUCTIONS}\n\n{EXAMPLES_HEADER}\n{examples}"
    return BASE_INSTRUCTIONS
