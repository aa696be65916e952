"""
Simple usage example for CULTURA

Asks the offline assistant a few questions and translates some terms.
Works without any API keys: remote services fall back to offline answers.
"""

from cultura import ChatOrchestrator, TranslationResolver
from cultura.fun_facts import get_random_fun_fact


def main():
    print("=" * 60)
    print("CULTURA Simple Example")
    print("=" * 60)
    print()

    orchestrator = ChatOrchestrator()
    print(orchestrator.get_greeting())
    print()

    # Example 1: a question the offline knowledge base can answer
    print("=" * 60)
    print("\n📝 Example 1: Asking about a festival\n")
    reply = orchestrator.submit("Tell me about Bihu festival")
    print(reply.content)
    print(f"\n(answered via {orchestrator.last_source})")

    # Example 2: questions about a state
    print("=" * 60)
    print("\n📝 Example 2: Asking about a state\n")
    reply = orchestrator.submit("What traditions does Sikkim have?")
    print(reply.content)
    for source in reply.sources:
        print(f"  - {source.name} ({source.attribution})")

    # Example 3: translation
    print("=" * 60)
    print("\n📝 Example 3: Translating cultural terms\n")
    translator = TranslationResolver()
    for text in ("Festival", "Bihu Festival", "Tradition"):
        for lang in ("as", "mni", "hi"):
            result = translator.resolve(text, "en", lang)
            print(f"  {text:<15} {lang:<4} {result.text}  [{result.method}]")

    # Example 4: a fun fact
    print("=" * 60)
    fact = get_random_fun_fact()
    print(f"\n{fact['icon']}  {fact['fact']}\n")

    summary = orchestrator.conversation.get_summary()
    print(f"Conversation: {summary['total_messages']} messages")


if __name__ == "__main__":
    main()
