from spendnote.cli import main

raise SystemExit(main())
