from mastermind.runner import main

main()
