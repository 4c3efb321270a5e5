from tally import Amount, Identifier, Infix, Literal, Posting, Transaction

# Named values used in amount expressions
context = {"lunch": Amount(12, "EUR"), "tip": Amount(2, "EUR")}

# Expenses:Food      lunch + tip
# Expenses:Books     15 USD
# Assets:Checking    -15 USD
# Assets:Checking
transaction = Transaction(
    [
        Posting("Expenses:Food", Infix.add(Identifier("lunch"), Identifier("tip"))),
        Posting("Expenses:Books", Literal(Amount(15, "USD"))),
        Posting("Assets:Checking", Literal(Amount(-15, "USD"))),
        Posting("Assets:Checking"),
    ]
)

evaluated = transaction.evaluate(context)
for posting in evaluated.postings:
    print(posting.account, posting.amount)
print(evaluated.balance.model_dump_json())
assert evaluated.postings[-1].amount == Amount(-14, "EUR")
assert evaluated.balance == {"EUR": 0, "USD": 0}
