from bestlang.cli import main

main()
