from diceroll.cli import main

main()
