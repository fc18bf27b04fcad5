from tinyvim.adapters.textual.app import main

raise SystemExit(main())
