"""myBudget - personal finance tracking backend."""
