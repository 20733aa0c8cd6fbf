from argnewline.cli.app import main

main()
