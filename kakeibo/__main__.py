from kakeibo.main import main

main()
