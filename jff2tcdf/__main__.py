from jff2tcdf.cli import main

main()
